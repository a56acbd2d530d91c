from pathlib import Path
from random import Random
from typing import Optional

from .Config import VALUE_RANGE


class MalformedInputError(ValueError):
    def __init__(self, path: str | Path, reason: str) -> None:
        super().__init__(f"Malformed input file `{path}`: {reason}")
        self.path = path
        self.reason = reason


def read_data_from_file(path: str | Path) -> list[int]:
    """
    First line is the count of numbers, second line holds the space separated numbers.
    Only the first `count` numbers are taken. A missing file gives an empty list.
    """
    path = Path(path)
    if not path.exists():
        print(f"File not found: {path}")
        return []

    lines = path.read_text(encoding="utf-8-sig").splitlines()
    if not lines or not lines[0].strip():
        raise MalformedInputError(path, "missing count line")
    try:
        count = int(lines[0])
    except ValueError:
        raise MalformedInputError(path, f"count `{lines[0].strip()}` is not an integer") from None
    if count < 0:
        raise MalformedInputError(path, f"negative count {count}")
    if count == 0:
        return []
    if len(lines) < 2:
        raise MalformedInputError(path, "missing data line")

    tokens = lines[1].split()[:count]
    if len(tokens) < count:
        raise MalformedInputError(path, f"expected {count} numbers, found {len(tokens)}")
    data = []
    for token in tokens:
        try:
            data.append(int(token))
        except ValueError:
            raise MalformedInputError(path, f"`{token}` is not an integer") from None
    return data


def write_data_file(path: str | Path, data: list[int]) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(f"{len(data)}\n{' '.join(map(str, data))}\n", encoding="utf-8")


def generate_data(N: int, rng: Optional[Random] = None, low: int = VALUE_RANGE[0], high: int = VALUE_RANGE[1]) -> list[int]:
    rng = Random() if rng is None else rng
    return [rng.randint(low, high) for _ in range(N)]
