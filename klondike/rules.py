from dataclasses import dataclass


@dataclass(frozen=True)
class Ruleset:
    num_decks: int = 2
    tableau_piles: int = 9
    max_seed: int = 1_000_000

    def __post_init__(self) -> None:
        if self.num_decks < 1:
            raise ValueError("at least one deck is required")
        if self.tableau_piles < 1:
            raise ValueError("at least one tableau pile is required")
        if self.tableau_deal_size() > self.deck_size():
            raise ValueError("not enough cards to deal the tableau")

    def deck_size(self) -> int:
        return 52 * self.num_decks

    def foundation_count(self) -> int:
        return 4 * self.num_decks

    def tableau_deal_size(self) -> int:
        return self.tableau_piles * (self.tableau_piles + 1) // 2
