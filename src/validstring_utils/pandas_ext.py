from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import pandas as pd

    from validstring_utils.service import ValidStringService


class StringCheckAccessor:
    """Pandas accessor for element-wise string checks.

    Usage:
        >>> from validstring_utils.pandas_ext import register_accessor
        >>> register_accessor()
        >>> pd.Series(["13800138000", "1234"]).vs.check("phone").tolist()
        [True, False]
    """

    def __init__(self, pandas_obj: pd.Series) -> None:
        self._obj = pandas_obj

    def check(
        self,
        kind: str,
        *,
        service: ValidStringService | None = None,
        **options: Any,
    ) -> pd.Series:
        """Run the ``kind`` check on every element.

        Missing and non-string values are reported as False.

        Args:
            kind: Validation kind name.
            service: Optional service to use instead of the default one.
            **options: Validator options, e.g. ``min_length``/``max_length``.

        Returns:
            Boolean Series aligned with the original index.
        """
        import pandas as pd

        from validstring_utils.service import get_default_service

        svc = service or get_default_service()
        cleaned = [v if isinstance(v, str) else None for v in self._obj]
        results = svc.validate_many(kind, cleaned, **options)
        values = [v is not None and r.is_valid for r, v in zip(results, cleaned)]
        return pd.Series(values, index=self._obj.index, dtype=bool, name=self._obj.name)


def register_accessor(name: str = "vs") -> None:
    """Register the string-check accessor on pandas Series.

    After calling this, use ``series.vs.check("email")``.

    Args:
        name: Name for the accessor (default: "vs").
    """
    import pandas as pd

    if not hasattr(pd.Series, name):
        pd.api.extensions.register_series_accessor(name)(StringCheckAccessor)


def check_series(series: pd.Series, kind: str, **options: Any) -> pd.Series:
    """Run the ``kind`` check over a Series without registering the accessor."""
    return StringCheckAccessor(series).check(kind, **options)


def validate_column(
    df: pd.DataFrame,
    column: str,
    kind: str,
    prefix: str = "",
    inplace: bool = False,
    **options: Any,
) -> pd.DataFrame:
    """Add a boolean ``<prefix><column>_valid`` column to a DataFrame.

    Args:
        df: Input DataFrame.
        column: Name of the column to check.
        kind: Validation kind name.
        prefix: Prefix for the new column name.
        inplace: If True, modify ``df`` instead of a copy.
        **options: Validator options.

    Returns:
        DataFrame with the new column.

    Raises:
        KeyError: If ``column`` is not in ``df``.
    """
    if column not in df.columns:
        raise KeyError(f"Column '{column}' not found in DataFrame")

    result = df if inplace else df.copy()
    result[f"{prefix}{column}_valid"] = check_series(df[column], kind, **options)
    return result
