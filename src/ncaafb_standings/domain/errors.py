from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class MalformedEntityError(ValueError):
    """A standings entity could not be built from the supplied fields.

    Raised for a missing/blank identifying field (`id`, `name`, `season`) or a
    numeric field that does not parse. Construction is all-or-nothing, so the
    caller never receives a partially built graph.
    """

    message: str
    context: dict[str, object] | None = None

    def __str__(self) -> str:
        if not self.context:
            return self.message
        return f"{self.message} | context={self.context}"
