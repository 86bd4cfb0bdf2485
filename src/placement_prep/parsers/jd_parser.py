from pathlib import Path


def load_jd_file(file_path: str) -> str:
    """Load a job description from a text file.

    The text is returned untouched so that length-based scoring sees exactly
    what was pasted.
    """
    return Path(file_path).read_text(encoding="utf-8")
