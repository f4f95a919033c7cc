from typing import Any, Iterable, Iterator, Self

from domain.errors import ValidationError


FALLBACK_PREFIX = "fallback-"


class Recipe:
    def __init__(
        self,
        *,
        id: str,
        name: str,
        ingredients: list[str],
        instructions: list[str],
        tags: list[str] | None = None,
        degraded: bool = False,
    ) -> None:
        self.id = id
        self.name = name
        self.ingredients = ingredients
        self.instructions = instructions
        self.tags = [] if tags is None else list(dict.fromkeys(tags))
        self.degraded = degraded

    def __repr__(self) -> str:
        return f"<Recipe(id={self.id}, name={self.name})>"

    @property
    def is_well_formed(self) -> bool:
        return bool(self.ingredients) and bool(self.instructions)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "ingredients": self.ingredients,
            "instructions": self.instructions,
            "tags": self.tags,
            "degraded": self.degraded,
        }


class IngredientList:
    """What the user has in the cupboard.

    Order is the order things were added in. Entries are stripped and an
    entry that is already present (exact, case-sensitive) is ignored.
    """

    def __init__(self, items: Iterable[str] = ()) -> None:
        self._items: list[str] = []
        for item in items:
            self.add(item)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __repr__(self) -> str:
        return f"<IngredientList({self._items})>"

    def add(self, item: str) -> bool:
        item = item.strip()
        if not item or item in self._items:
            return False
        self._items.append(item)
        return True

    def remove(self, item: str) -> bool:
        if item not in self._items:
            return False
        self._items.remove(item)
        return True

    def to_list(self) -> list[str]:
        return list(self._items)


class Credential:
    def __init__(self, *, username: str, password: str) -> None:
        self.username = username
        self.password = password

    def __repr__(self) -> str:
        return f"<Credential(username={self.username})>"

    @classmethod
    def from_body(cls, body: Any) -> Self:
        if not isinstance(body, dict):
            raise ValidationError("Expected a JSON object.")
        username = body.get("username")
        password = body.get("password")
        if not (isinstance(username, str) and username):
            raise ValidationError("Missing username.")
        if not (isinstance(password, str) and password):
            raise ValidationError("Missing password.")
        return cls(username=username, password=password)


class Session:
    def __init__(
        self,
        *,
        token: str,
        user: dict[str, Any],
        message: str = "Login successful",
    ) -> None:
        self.token = token
        self.user = user
        self.message = message

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": True,
            "message": self.message,
            "token": self.token,
            "user": self.user,
        }
