from dataclasses import dataclass


@dataclass(frozen=True)
class ScoreRecord:
    receipt_id: str
    points: int
