from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class Application:
    application_id: str
    group_size: int = 1
    is_invitation: bool = False
    is_relation: bool = False
    past_score: float = 5.0
    last_result: Optional[str] = None  # "win", "lose" or None
    member_id: str = ""
    name: str = ""
    address: str = ""
    tags: List[str] = field(default_factory=list)

    @property
    def is_priority(self) -> bool:
        """Invitation holders and relations are allocated first."""
        return self.is_invitation or self.is_relation

    @property
    def lost_last_round(self) -> bool:
        return self.last_result == "lose"
