"""Dice rolling and success probability.

The dice engine takes its random source as a constructor argument. By
default it uses the best source the platform offers (see
``select_dice_source``) and reports which one is active so the choice can be
shown to players or logged.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Protocol

from ..models import DieType, RollMode, ValidationResult
from ..models.schemas import validate_roll_request
from ..utils.rng import select_dice_source

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Anything with ``randint`` (random.Random, random.SystemRandom, GameRNG)."""

    def randint(self, a: int, b: int) -> int: ...


@dataclass
class RollResult:
    """Outcome of a complete roll.

    Attributes:
        die_type: Die that was rolled
        mode: Normal, advantage or disadvantage
        base_result: Kept die value before modifiers
        all_rolls: Every die rolled, in roll order (two for advantage/disadvantage)
        modifiers: Modifiers applied to the base result
        final_result: base_result plus the sum of modifiers
    """

    die_type: DieType
    mode: RollMode
    base_result: int
    all_rolls: list[int]
    modifiers: list[int]
    final_result: int


@dataclass
class DieStats:
    sides: int
    min: int
    max: int
    average: float


@dataclass
class RandomnessReport:
    """Sample of d20 rolls for eyeballing the random source.

    Attributes:
        samples: Number of rolls taken
        average: Mean roll (10.5 expected)
        distribution: Count per face, index 0 is a roll of 1
        chi_square: Goodness-of-fit statistic against a uniform d20
            (19 degrees of freedom; values far above ~30 are suspicious)
    """

    samples: int
    average: float
    distribution: list[int] = field(default_factory=list)
    chi_square: float = 0.0


class DiceEngine:
    """Rolls dice from an injected or auto-selected random source."""

    def __init__(self, rng: RandomSource | None = None, source: str | None = None):
        """Initialize the engine.

        Args:
            rng: Random source to use; if None the best available source is
                selected once here
            source: Description of an injected source, for reporting
        """
        if rng is None:
            rng, source = select_dice_source()
        self.rng = rng
        self.source = source or f"Injected ({type(rng).__name__})"
        logger.debug(f"Dice engine using {self.source}")

    @property
    def randomness_source(self) -> str:
        """Human-readable description of the active random source."""
        return self.source

    def random_int(self, low: int, high: int) -> int:
        """Return a uniform integer in [low, high], inclusive."""
        return self.rng.randint(low, high)

    def roll_die(self, die_type: DieType) -> int:
        """Roll a single die of the given type."""
        return self.random_int(1, DieType(die_type).sides)

    def roll_dice_with_mode(self, die_type: DieType, mode: RollMode) -> tuple[int, list[int]]:
        """Roll with normal, advantage or disadvantage resolution.

        Args:
            die_type: Die to roll
            mode: Resolution mode

        Returns:
            Tuple of (kept result, rolls). Advantage/disadvantage roll twice
            and keep the higher/lower; rolls stay in the order they were made.
        """
        mode = RollMode(mode)
        if mode is RollMode.NORMAL:
            roll = self.roll_die(die_type)
            return roll, [roll]

        rolls = [self.roll_die(die_type), self.roll_die(die_type)]
        result = max(rolls) if mode is RollMode.ADVANTAGE else min(rolls)
        return result, rolls

    @staticmethod
    def apply_modifiers(base_result: int, modifiers: list[int]) -> int:
        """Add modifiers to a result. No clamping is applied."""
        return base_result + sum(modifiers)

    def perform_roll(
        self,
        die_type: DieType,
        mode: RollMode = RollMode.NORMAL,
        modifiers: list[int] | None = None,
    ) -> RollResult:
        """Roll, resolve the mode and apply modifiers.

        Args:
            die_type: Die to roll
            mode: Resolution mode
            modifiers: Integer modifiers (may be negative)

        Returns:
            RollResult with the base result, every die and the final total
        """
        modifiers = list(modifiers or [])
        base_result, all_rolls = self.roll_dice_with_mode(die_type, mode)
        return RollResult(
            die_type=DieType(die_type),
            mode=RollMode(mode),
            base_result=base_result,
            all_rolls=all_rolls,
            modifiers=modifiers,
            final_result=self.apply_modifiers(base_result, modifiers),
        )

    @staticmethod
    def get_die_stats(die_type: DieType) -> DieStats:
        sides = DieType(die_type).sides
        return DieStats(sides=sides, min=1, max=sides, average=(sides + 1) / 2)

    @staticmethod
    def calculate_success_probability(
        target: int,
        die_type: DieType,
        mode: RollMode = RollMode.NORMAL,
        modifiers: list[int] | int | None = None,
    ) -> float:
        """Probability that a roll meets or beats a target number.

        Modifiers lower the number the die itself has to show. Advantage
        succeeds if either die succeeds, disadvantage only if both do.

        Args:
            target: Total needed for success
            die_type: Die rolled
            mode: Resolution mode
            modifiers: List of modifiers, or a single summed modifier

        Returns:
            Probability in [0, 1]

        Examples:
            >>> DiceEngine.calculate_success_probability(11, DieType.D20)
            0.5
        """
        sides = DieType(die_type).sides
        if modifiers is None:
            modifier = 0
        elif isinstance(modifiers, int):
            modifier = modifiers
        else:
            modifier = sum(modifiers)

        effective_target = target - modifier
        if effective_target <= 1:
            return 1.0  # Always succeeds
        if effective_target > sides:
            return 0.0  # Never succeeds

        single_success = (sides - effective_target + 1) / sides
        mode = RollMode(mode)
        if mode is RollMode.NORMAL:
            return single_success
        if mode is RollMode.ADVANTAGE:
            return 1 - (1 - single_success) ** 2
        return single_success**2

    @staticmethod
    def validate_roll_params(die_type: Any, mode: Any, modifiers: Any) -> ValidationResult:
        """Check roll parameters without rolling.

        Reports the first failed constraint: unknown die type, unknown
        mode, modifiers not a list, or a non-integer modifier.
        """
        return validate_roll_request(die_type, mode, modifiers)

    @staticmethod
    def format_roll_result(result: RollResult, include_details: bool = False) -> str:
        """Summarize a roll, e.g. ``"d20: 14 (advantage) [rolled: 14, 3] +2 = 16"``.

        Args:
            result: Roll to describe
            include_details: Show both dice for advantage/disadvantage

        Returns:
            One-line summary
        """
        summary = f"{result.die_type.value}: {result.base_result}"

        if result.mode is not RollMode.NORMAL:
            summary += f" ({result.mode.value})"
            if include_details and len(result.all_rolls) > 1:
                summary += f" [rolled: {', '.join(str(r) for r in result.all_rolls)}]"

        if result.modifiers:
            modifier_sum = sum(result.modifiers)
            sign = "+" if modifier_sum >= 0 else ""
            summary += f" {sign}{modifier_sum} = {result.final_result}"

        return summary

    def sample_distribution(self, samples: int = 1000) -> RandomnessReport:
        """Roll many d20s and measure how uniform they look.

        Args:
            samples: Number of d20 rolls (> 0)

        Returns:
            RandomnessReport with average, per-face counts and chi-square
        """
        sides = DieType.D20.sides
        distribution = [0] * sides
        total = 0
        for _ in range(samples):
            roll = self.roll_die(DieType.D20)
            distribution[roll - 1] += 1
            total += roll

        expected = samples / sides
        chi_square = sum((observed - expected) ** 2 / expected for observed in distribution)
        return RandomnessReport(
            samples=samples,
            average=total / samples,
            distribution=distribution,
            chi_square=chi_square,
        )
