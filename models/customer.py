from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class Customer:
    customer_id: str
    member_id: str
    name: str
    email: str = ""
    address: str = ""
    tags: List[str] = field(default_factory=list)  # "invitation", "relation", "fanclub"
    total_score: float = 5.0
    group_size: int = 1             # party size including the member, 1-10
    last_result: Optional[str] = None

    @property
    def is_invitation(self) -> bool:
        return "invitation" in self.tags

    @property
    def is_relation(self) -> bool:
        return "relation" in self.tags
