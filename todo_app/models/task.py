from dataclasses import dataclass, asdict


@dataclass
class Task:
    """A single to-do item, addressed only by its position in the list."""
    name: str
    done: bool = False

    def to_dict(self):
        return asdict(self)

    @classmethod
    def from_dict(cls, data):
        return cls(name=data["name"], done=bool(data.get("done", False)))
