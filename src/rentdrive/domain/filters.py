from __future__ import annotations

from dataclasses import dataclass, field, replace
from decimal import Decimal

from rentdrive.domain.errors import InvalidArgument
from rentdrive.domain.vehicle import VehicleClass


# ==============================================================================
# Price Domain
# ==============================================================================

PRICE_FLOOR = Decimal("0")
PRICE_CEILING = Decimal("200")
PRICE_STEP = Decimal("10")  # Slider granularity; not enforced by PriceRange


@dataclass(frozen=True, slots=True)
class PriceRange:
    """
    Inclusive daily-rate band.

    Always satisfies PRICE_FLOOR <= lower <= upper <= PRICE_CEILING. Bounds are
    taken as given: no clamping, no rounding to PRICE_STEP.

    Raises:
        InvalidArgument: If a bound is not int or Decimal, lies outside
            [PRICE_FLOOR, PRICE_CEILING], or lower > upper
    """

    lower: Decimal = PRICE_FLOOR
    upper: Decimal = PRICE_CEILING

    def __post_init__(self) -> None:
        low = _coerce_bound("lower", self.lower)
        high = _coerce_bound("upper", self.upper)

        for name, bound in (("lower", low), ("upper", high)):
            if not PRICE_FLOOR <= bound <= PRICE_CEILING:
                raise InvalidArgument(
                    f"{name} bound must be between {PRICE_FLOOR} and {PRICE_CEILING}",
                    field=name,
                    value=str(bound),
                )
        if low > high:
            raise InvalidArgument(
                "lower bound cannot be greater than upper bound",
                lower=str(low),
                upper=str(high),
            )

        # int bounds are stored as Decimal
        object.__setattr__(self, "lower", low)
        object.__setattr__(self, "upper", high)

    def contains(self, amount: Decimal) -> bool:
        """Inclusive on both ends."""
        return self.lower <= amount <= self.upper


@dataclass(frozen=True, slots=True)
class FilterState:
    """
    Facet selection for one catalog view.

    Empty class or capacity selections mean "no restriction". Instances are
    immutable; every operation below returns a new state. Direct construction
    is checked the same way the operations are.
    """

    selected_classes: frozenset[VehicleClass] = field(default_factory=frozenset)
    price_range: PriceRange = field(default_factory=PriceRange)
    selected_capacities: frozenset[int] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        for vehicle_class in self.selected_classes:
            if not isinstance(vehicle_class, VehicleClass):
                raise InvalidArgument(
                    "selected_classes must hold VehicleClass members",
                    field="vehicle_class",
                    value=repr(vehicle_class),
                )
        for capacity in self.selected_capacities:
            _check_capacity(capacity)
        if not isinstance(self.price_range, PriceRange):
            raise InvalidArgument(
                "price_range must be a PriceRange",
                field="price_range",
                value=repr(self.price_range),
            )

    @property
    def is_default(self) -> bool:
        """No facet restricts the result; the "Reset filters" control has nothing to do."""
        return self == FilterState()


# ==============================================================================
# Operations
# ==============================================================================


def toggle_class(state: FilterState, vehicle_class: VehicleClass | str) -> FilterState:
    """
    Add the class to the selection if absent, remove it if present.

    Raises:
        InvalidArgument: If vehicle_class is not a VehicleClass member (or its value)
    """
    member = _coerce_class(vehicle_class)
    return replace(state, selected_classes=state.selected_classes ^ {member})


def toggle_capacity(state: FilterState, capacity: int) -> FilterState:
    """
    Add the capacity to the selection if absent, remove it if present.

    Raises:
        InvalidArgument: If capacity is not a positive integer
    """
    _check_capacity(capacity)
    return replace(state, selected_capacities=state.selected_capacities ^ {capacity})


def set_price_range(state: FilterState, lower: Decimal | int, upper: Decimal | int) -> FilterState:
    """
    Replace the price range.

    Raises:
        InvalidArgument: If the bounds do not form a valid PriceRange
    """
    return replace(state, price_range=PriceRange(lower=lower, upper=upper))  # type: ignore[arg-type]


def reset(state: FilterState | None = None) -> FilterState:
    """Return the default state regardless of the current one."""
    return FilterState()


def _coerce_class(value: VehicleClass | str) -> VehicleClass:
    try:
        return VehicleClass(value)
    except ValueError:
        raise InvalidArgument(
            f"vehicle_class must be one of {[c.value for c in VehicleClass]}",
            field="vehicle_class",
            value=repr(value),
        ) from None


def _check_capacity(capacity: int) -> None:
    # bool is an int subclass; True is not a seat count
    if isinstance(capacity, bool) or not isinstance(capacity, int):
        raise InvalidArgument("capacity must be an integer", field="capacity", value=repr(capacity))
    if capacity <= 0:
        raise InvalidArgument("capacity must be > 0", field="capacity", value=capacity)


def _coerce_bound(name: str, value: Decimal | int) -> Decimal:
    # Guardrails: prevent float leakage past boundary
    if isinstance(value, bool) or not isinstance(value, (int, Decimal)):
        raise InvalidArgument(
            f"{name} bound must be int or Decimal (no floats past the boundary)",
            field=name,
            value=repr(value),
        )
    bound = Decimal(value)
    if not bound.is_finite():
        raise InvalidArgument(f"{name} bound must be finite", field=name, value=str(bound))
    return bound
