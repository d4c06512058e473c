from pathlib import Path

from wordmind.vocab import WordCorpus


def load_corpus(path: str) -> WordCorpus:
    """
    Load a word corpus from a dictionary JSON file or a CSV with a 'word' column.
    """
    suffix = Path(path).suffix.lower()
    if suffix == ".json":
        return WordCorpus.from_json(path)
    if suffix == ".csv":
        return WordCorpus.from_csv(path)
    raise ValueError(f"unsupported corpus file type: {path} (expected .json or .csv)")
