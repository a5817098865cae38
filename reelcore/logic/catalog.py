"""Symbol catalog: the immutable symbol set of one theme."""
from reelcore.errors import ErrorCode, GameError
from reelcore.logic.models import Symbol, SymbolKind
from reelcore.logic.themes import THEMES


class SymbolCatalog:
    """
    Ordered, immutable symbol set.

    Catalog order is the order used by cumulative sampling, so it must be
    stable for a given theme.
    """

    def __init__(self, theme_id: str, name: str, symbols: list[Symbol]):
        self.theme_id = theme_id
        self.name = name
        self.symbols: tuple[Symbol, ...] = tuple(symbols)
        self._by_id = {symbol.id: symbol for symbol in self.symbols}

    @classmethod
    def from_theme(
        cls,
        theme_id: str,
        wild_rarity: float,
        scatter_rarity: float,
    ) -> "SymbolCatalog":
        """Build a theme's catalog; wild/scatter probabilities come from rarity."""
        theme = THEMES.get(theme_id)
        if theme is None:
            raise GameError(
                ErrorCode.UNKNOWN_THEME,
                f"Unknown theme {theme_id!r}. Available: {sorted(THEMES)}",
            )

        symbols = [
            Symbol(
                id=symbol_id,
                display_token=token,
                payout_value=value,
                base_probability=probability,
                color=color,
            )
            for symbol_id, token, value, probability, color in theme["symbols"]
        ]
        wild_id, wild_token, wild_color = theme["wild"]
        symbols.append(Symbol(
            id=wild_id,
            display_token=wild_token,
            base_probability=wild_rarity,
            color=wild_color,
            kind=SymbolKind.WILD,
        ))
        scatter_id, scatter_token, scatter_color = theme["scatter"]
        symbols.append(Symbol(
            id=scatter_id,
            display_token=scatter_token,
            base_probability=scatter_rarity,
            color=scatter_color,
            kind=SymbolKind.SCATTER,
        ))
        return cls(theme_id, theme["name"], symbols)

    def __len__(self) -> int:
        return len(self.symbols)

    def __contains__(self, symbol_id: object) -> bool:
        return symbol_id in self._by_id

    def get(self, symbol_id: str) -> Symbol | None:
        return self._by_id.get(symbol_id)

    @property
    def regular_symbols(self) -> list[Symbol]:
        return [s for s in self.symbols if s.is_regular]

    @property
    def wild(self) -> Symbol | None:
        return next((s for s in self.symbols if s.is_wild), None)

    @property
    def scatter(self) -> Symbol | None:
        return next((s for s in self.symbols if s.is_scatter), None)

    def highest_paying_regular(self) -> Symbol | None:
        """Regular symbol with the largest positive payout (first wins ties)."""
        paying = [s for s in self.regular_symbols if s.payout_value > 0]
        if not paying:
            return None
        return max(paying, key=lambda s: s.payout_value)


def available_themes() -> dict[str, str]:
    """Theme id -> display name."""
    return {theme_id: theme["name"] for theme_id, theme in THEMES.items()}
