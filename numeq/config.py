"""Options read from the ``[preprocessor.numeq]`` table of ``book.toml``."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Mapping

from attrs import define, field, validators

from .errors import ConfigError

if TYPE_CHECKING:
    from .context import PreprocessorContext

logger = logging.getLogger(__name__)

# Name of the preprocessor, also the key of its table in ``book.toml``.
NAME = "numeq"


def _check_depth(
    instance: Any, attribute: Any, value: Any  # noqa: ANN401
) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ConfigError(
            f"preprocessor.{NAME}.depth must be a non-negative integer, "
            f"got {value!r}"
        )


@define(slots=True, frozen=True)
class NumEqConfig:
    """Options controlling how equations are numbered.

    Attributes:
        prefix: Prefix equation numbers with the chapter section number.
        depth: Number of leading section number components whose change
            restarts the counter; ``0`` disables prefix-based resets.
        global_: Keep counting across chapters when ``depth`` is ``0``.
            Stored under the ``global`` key.
    """

    prefix: bool = field(default=False, validator=validators.instance_of(bool))
    depth: int = field(default=0, validator=_check_depth)
    global_: bool = field(
        default=False, validator=validators.instance_of(bool)
    )

    @classmethod
    def from_mapping(cls, table: Mapping[str, Any] | None) -> NumEqConfig:
        """Build the options from a ``[preprocessor.numeq]`` table.

        Boolean options holding another type are ignored with a warning.

        Args:
            table: Parsed table, ``None`` when the section is missing.

        Returns:
            The validated options.

        Throws:
            ConfigError: If ``depth`` is not a non-negative integer.
        """

        table = table or {}
        flags: dict[str, bool] = {}
        for key, attr in (("prefix", "prefix"), ("global", "global_")):
            if key not in table:
                continue
            value = table[key]
            if isinstance(value, bool):
                flags[attr] = value
            else:
                logger.warning(
                    f"Ignoring preprocessor.{NAME}.{key}: "
                    f"expected a boolean, got {value!r}"
                )

        return cls(depth=table.get("depth", 0), **flags)

    @classmethod
    def from_context(cls, ctx: PreprocessorContext) -> NumEqConfig:
        """Build the options from the mdBook preprocessor context."""

        table = ctx.get(f"preprocessor.{NAME}")
        if table is not None and not isinstance(table, Mapping):
            raise ConfigError(f"preprocessor.{NAME} must be a table")
        return cls.from_mapping(table)
