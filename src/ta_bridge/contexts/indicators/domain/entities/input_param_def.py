from __future__ import annotations

from dataclasses import dataclass

from .input_kind import InputKind
from .price_role import PriceRole


@dataclass(frozen=True, slots=True)
class InputParamDef:
    """
    Declaration of one native input parameter position.

    Related: .function_schema, .price_role
    """

    name: str
    kind: InputKind
    roles: tuple[PriceRole, ...] = ()

    def __post_init__(self) -> None:
        """
        Validate kind-specific role invariants.

        Args:
            None.
        Returns:
            None.
        Assumptions:
            Role order is the order in which callers supply bundle arrays.
        Raises:
            ValueError: If name is blank, a price parameter has no or duplicated roles,
                or a single-array parameter declares roles.
        Side Effects:
            Normalizes `name` by stripping spaces and `roles` into `PriceRole` members.
        """
        normalized_name = self.name.strip()
        object.__setattr__(self, "name", normalized_name)
        if not normalized_name:
            raise ValueError("InputParamDef requires a non-empty name")

        roles = tuple(PriceRole(role) for role in self.roles)
        object.__setattr__(self, "roles", roles)

        if self.kind is InputKind.PRICE:
            if len(roles) == 0:
                raise ValueError(f"price input {normalized_name!r} requires at least one role")
            if len(set(roles)) != len(roles):
                raise ValueError(f"price input {normalized_name!r} roles must be unique")
            return

        if roles:
            raise ValueError(f"{self.kind.value} input {normalized_name!r} must not declare roles")

    @property
    def width(self) -> int:
        """
        Return how many raw caller arrays this parameter consumes.

        Args:
            None.
        Returns:
            int: Role count for price bundles, one otherwise.
        Assumptions:
            Invariants were checked at construction.
        Raises:
            None.
        Side Effects:
            None.
        """
        if self.kind is InputKind.PRICE:
            return len(self.roles)
        return 1

    @property
    def is_bundle(self) -> bool:
        return self.kind is InputKind.PRICE
