import argparse
import re
import sys
from typing import List, Set

import pandas as pd
import requests


def read_filmes(path: str) -> List[dict]:
    df = pd.read_csv(path, usecols=["titulo", "genero", "duracao"])
    df = df.dropna(subset=["titulo", "genero", "duracao"])
    df["duracao"] = df["duracao"].astype(int)
    return df.to_dict(orient="records")


def chunked(rows: List[dict], size: int) -> List[List[dict]]:
    return [rows[i : i + size] for i in range(0, len(rows), size)]


def rejected_indexes(problem: dict) -> Set[int]:
    indexes = set()
    for key in problem.get("errors", {}):
        match = re.match(r"\[(\d+)\]", key)
        if match:
            indexes.add(int(match.group(1)))
    return indexes


def insert_filmes(base_url: str, filmes: List[dict], dry_run: bool, limit: int, chunk_size: int, timeout: float) -> int:
    url = base_url.rstrip("/") + "/filme/adicionarEmLote"
    if limit:
        filmes = filmes[:limit]

    count = 0
    for chunk in chunked(filmes, chunk_size):
        if dry_run:
            count += len(chunk)
            continue
        r = requests.post(url, json=chunk, timeout=timeout)
        if r.status_code == 201:
            count += len(chunk)
            continue
        if r.status_code == 422:
            # invalid items are skipped, the valid ones in the chunk are stored
            rejected = rejected_indexes(r.json())
            count += len(chunk) - len(rejected)
            print(f"{len(rejected)} filmes rejected: {r.text}", file=sys.stderr)
            continue
        r.raise_for_status()
    return count


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--base_url", type=str, default="http://localhost:8000")
    parser.add_argument("--filmes_path", type=str, default="data/filmes.csv")
    parser.add_argument("--limit", type=int, default=0)
    parser.add_argument("--chunk_size", type=int, default=50)
    parser.add_argument("--timeout", type=float, default=10.0)
    parser.add_argument("--dry_run", action="store_true")
    args = parser.parse_args()
    try:
        rows = read_filmes(args.filmes_path)
    except (OSError, ValueError) as e:
        print(f"Failed to read filmes: {e}", file=sys.stderr)
        sys.exit(1)
    inserted = insert_filmes(args.base_url, rows, args.dry_run, args.limit, args.chunk_size, args.timeout)
    print(f"{inserted} filmes stored")


if __name__ == "__main__":
    main()
