from dataclasses import dataclass


@dataclass(frozen=True)
class Player:
    name: str                  # unique among signed-in players
