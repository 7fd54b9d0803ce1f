import pandas as pd
from pathlib import Path


def load_tasks(file_path):
    """
    Reads a CSV of the form:
        job,p_i
        1,5
        ...
    Returns: list of dicts
    """
    if not Path(file_path).exists():
        raise FileNotFoundError(f"Dataset not found: {file_path}")

    df = pd.read_csv(file_path)

    required_cols = {"job", "p_i"}
    if not required_cols.issubset(df.columns):
        raise ValueError(f"CSV must contain columns: {required_cols}")

    if df.empty:
        return []
    if df["p_i"].isna().any() or not pd.api.types.is_integer_dtype(df["p_i"]):
        raise ValueError("Column p_i must hold integer processing times.")
    if (df["p_i"] <= 0).any():
        raise ValueError("Processing times in column p_i must be positive.")

    tasks = df.to_dict(orient="records")
    return tasks


def processing_times(tasks):
    return [int(task["p_i"]) for task in tasks]
