from dataclasses import dataclass


def _coerce_id(value) -> int:
    if value is None:
        return 0
    # bool is an int subclass; a true/false id is never valid
    if isinstance(value, bool):
        raise ValueError(f"id must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"id must be an integer, got {value!r}")
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            raise ValueError(f"id must be an integer, got {value!r}") from None
    raise ValueError(f"id must be an integer, got {type(value).__name__}")


def _coerce_text(data: dict, key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"{key} must be a string, got {type(value).__name__}")
    return value


@dataclass
class Post:
    id: int
    title: str
    body: str

    @property
    def doc_id(self) -> str:
        return str(self.id)

    def to_json(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "body": self.body,
        }

    @staticmethod
    def from_json(data) -> "Post":
        """
        Build a Post from one decoded element of the posts API response.

        Unknown keys are ignored and missing keys fall back to 0 / "".
        Raises ValueError when the element is not an object or a field
        has the wrong type.
        """
        if not isinstance(data, dict):
            raise ValueError(f"post must be a JSON object, got {type(data).__name__}")
        return Post(
            id=_coerce_id(data.get("id")),
            title=_coerce_text(data, "title"),
            body=_coerce_text(data, "body"),
        )
