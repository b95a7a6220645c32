"""
Roles — Централизованное разрешение ролей вызывающего

Единственное место, где caller сравнивается с admin / oracle / owner.
Мутирующие операции вызывают require_admin / require_oracle один раз,
до проверки входных данных.
"""

from enum import Enum
from typing import FrozenSet, Optional

from asset_tracker.core.domain.admin_config import AdminConfig
from asset_tracker.core.domain.results import (
    ERR_NOT_AUTHORIZED,
    ERR_ORACLE_NOT_SET,
    ErrorKind,
    TrackerResult,
)


class Role(str, Enum):
    """Роль principal относительно конфигурации."""

    ADMIN = "ADMIN"
    ORACLE = "ORACLE"
    OWNER = "OWNER"
    OTHER = "OTHER"


def resolve_roles(
    config: AdminConfig, caller: str, owner: Optional[str] = None
) -> FrozenSet[Role]:
    """
    Роли caller.

    Один principal может совмещать роли (например, admin назначил oracle
    самого себя), поэтому возвращается множество. OTHER только если
    ни одна роль не подошла.

    Args:
        config: Текущая конфигурация
        caller: Вызывающий principal
        owner: Владелец ресурса (для owner-операций)

    Returns:
        Непустое множество ролей
    """
    roles = set()
    if caller == config.admin:
        roles.add(Role.ADMIN)
    if config.oracle_configured and caller == config.oracle:
        roles.add(Role.ORACLE)
    if owner is not None and caller == owner:
        roles.add(Role.OWNER)
    return frozenset(roles) if roles else frozenset({Role.OTHER})


def require_admin(config: AdminConfig, caller: str) -> Optional[TrackerResult]:
    if Role.ADMIN not in resolve_roles(config, caller):
        return TrackerResult.failure(
            ErrorKind.UNAUTHORIZED,
            ERR_NOT_AUTHORIZED,
            "caller_not_admin",
            f"caller={caller!r}",
        )
    return None


def require_oracle(config: AdminConfig, caller: str) -> Optional[TrackerResult]:
    """
    Oracle-gate: сначала наличие oracle, затем совпадение caller.
    """
    if not config.oracle_configured:
        return TrackerResult.failure(
            ErrorKind.ORACLE_NOT_CONFIGURED,
            ERR_ORACLE_NOT_SET,
            "oracle_not_configured",
            "oracle-gated call without configured oracle",
        )
    if Role.ORACLE not in resolve_roles(config, caller):
        return TrackerResult.failure(
            ErrorKind.UNAUTHORIZED,
            ERR_NOT_AUTHORIZED,
            "caller_not_oracle",
            f"caller={caller!r}",
        )
    return None
