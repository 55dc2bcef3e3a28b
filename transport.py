"""
Vehicles that travel along planned routes.

Hierarchy:
    Transport                       - speed and position bookkeeping, no fuel
    LandTransport / WaterTransport / AirTransport
                                    - start with a full tank, refuse to move
                                      when empty, do not consume
    Car, Train / Yacht / Helicopter - consume `consumption_rate` litres per km
                                      and shorten a move they cannot afford

Distances are in km, speeds in km/h and fuel in litres. `move` returns the
distance actually travelled.
"""

import logging

logger = logging.getLogger(__name__)


def _require_non_negative(name: str, value: float) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


class Transport:
    """Base vehicle: a name, a speed and a position along the current route."""

    def __init__(self, name: str, speed: float) -> None:
        _require_non_negative("speed", speed)
        self.name = name
        self.speed = speed
        self.position = 0.0

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"

    @property
    def fuel(self) -> float:
        return 0.0

    def set_fuel(self, amount: float) -> None:
        pass

    def has_fuel(self) -> bool:
        return True

    def update_position(self, distance: float) -> None:
        self.position += distance

    def move(self, distance: float) -> float:
        _require_non_negative("distance", distance)
        logger.info(f"{self.name} moves {distance} km at speed {self.speed} km/h.")
        self.update_position(distance)
        return distance

    def accelerate(self, increment: float) -> None:
        _require_non_negative("increment", increment)
        self.speed += increment
        logger.info(f"{self.name} accelerates to {self.speed} km/h.")

    def brake(self, decrement: float) -> None:
        _require_non_negative("decrement", decrement)
        self.speed = max(0.0, self.speed - decrement)
        logger.info(f"{self.name} slows down to {self.speed} km/h.")

    def info(self) -> str:
        return (
            f"Name: {self.name}, speed: {self.speed} km/h, "
            f"position: {self.position} km"
        )


class _Fuelled(Transport):
    """Tank handling shared by the land, water and air families."""

    def __init__(self, name: str, speed: float, fuel_capacity: float) -> None:
        super().__init__(name, speed)
        _require_non_negative("fuel_capacity", fuel_capacity)
        self.fuel_capacity = fuel_capacity
        self._fuel = fuel_capacity

    @property
    def fuel(self) -> float:
        return self._fuel

    def set_fuel(self, amount: float) -> None:
        self._fuel = max(0.0, min(amount, self.fuel_capacity))

    def has_fuel(self) -> bool:
        return self._fuel > 0

    def _refuse_if_empty(self) -> bool:
        if self.has_fuel():
            return False
        logger.warning(f"{self.name} cannot move: Out of fuel.")
        return True

    def _affordable(self, distance: float, rate: float) -> float:
        """Shortens distance to what the tank can pay for at `rate` L/km."""
        if distance * rate <= self._fuel:
            return distance
        affordable = self._fuel / rate
        logger.warning(
            f"{self.name} does not have enough fuel to move {distance} km, "
            f"will move only {affordable} km."
        )
        return affordable

    def _consume(self, distance: float, rate: float) -> float:
        _require_non_negative("distance", distance)
        if self._refuse_if_empty():
            return 0.0
        moved = self._affordable(distance, rate)
        self._fuel = max(0.0, self._fuel - moved * rate)
        self.update_position(moved)
        return moved

    def _fuel_info(self) -> str:
        return f"Fuel: {self._fuel}/{self.fuel_capacity} liters"


# =============================================================================
# Families
# =============================================================================


class LandTransport(_Fuelled):
    def __init__(
        self, name: str, speed: float, wheels: int, fuel_capacity: float
    ) -> None:
        super().__init__(name, speed, fuel_capacity)
        self.wheels = wheels

    def move(self, distance: float) -> float:
        _require_non_negative("distance", distance)
        if self._refuse_if_empty():
            return 0.0
        logger.info(f"{self.name} drives on land with {self.wheels} wheels.")
        self.update_position(distance)
        return distance

    def info(self) -> str:
        return (
            f"{super().info()}\n"
            f"Number of wheels: {self.wheels}, {self._fuel_info()}"
        )


class WaterTransport(_Fuelled):
    def __init__(
        self, name: str, speed: float, propulsion: str, fuel_capacity: float
    ) -> None:
        super().__init__(name, speed, fuel_capacity)
        self.propulsion = propulsion

    def move(self, distance: float) -> float:
        _require_non_negative("distance", distance)
        if self._refuse_if_empty():
            return 0.0
        self.update_position(distance)
        logger.info(
            f"{self.name} sails on water using {self.propulsion}, moved {distance} km."
        )
        return distance

    def info(self) -> str:
        return (
            f"{super().info()}\n"
            f"Propulsion type: {self.propulsion}, {self._fuel_info()}"
        )


class AirTransport(_Fuelled):
    def __init__(
        self, name: str, speed: float, altitude: float, fuel_capacity: float
    ) -> None:
        super().__init__(name, speed, fuel_capacity)
        self.altitude = altitude

    def move(self, distance: float) -> float:
        _require_non_negative("distance", distance)
        if self._refuse_if_empty():
            return 0.0
        self.update_position(distance)
        logger.info(
            f"{self.name} flies at an altitude of {self.altitude} meters, "
            f"moved {distance} km."
        )
        return distance

    def info(self) -> str:
        return (
            f"{super().info()}\n"
            f"Maximum flight altitude: {self.altitude} m, {self._fuel_info()}"
        )


# =============================================================================
# Vehicles
# =============================================================================


class Car(LandTransport):
    def __init__(
        self,
        name: str,
        speed: float,
        wheels: int,
        fuel_type: str,
        fuel_capacity: float,
        consumption_rate: float,
    ) -> None:
        super().__init__(name, speed, wheels, fuel_capacity)
        self.fuel_type = fuel_type
        _require_non_negative("consumption_rate", consumption_rate)
        self.consumption_rate = consumption_rate

    def move(self, distance: float) -> float:
        moved = self._consume(distance, self.consumption_rate)
        if moved:
            logger.info(
                f"{self.name} drives on the road using {self.fuel_type}, "
                f"distance moved: {moved} km."
            )
        return moved

    def info(self) -> str:
        return (
            f"{super().info()}\n"
            f"Fuel type: {self.fuel_type}, "
            f"Consumption rate: {self.consumption_rate} L/km"
        )


class Train(LandTransport):
    def __init__(
        self,
        name: str,
        speed: float,
        wheels: int,
        carriages: int,
        fuel_capacity: float,
        consumption_rate: float,
    ) -> None:
        super().__init__(name, speed, wheels, fuel_capacity)
        self.carriages = carriages
        _require_non_negative("consumption_rate", consumption_rate)
        self.consumption_rate = consumption_rate

    def move(self, distance: float) -> float:
        moved = self._consume(distance, self.consumption_rate)
        if moved:
            logger.info(
                f"{self.name} runs on rails with {self.carriages} carriages, "
                f"moved {moved} km."
            )
        return moved

    def info(self) -> str:
        return (
            f"{super().info()}\n"
            f"Number of carriages: {self.carriages}, "
            f"Fuel consumption rate: {self.consumption_rate} L/km"
        )


class Yacht(WaterTransport):
    def __init__(
        self,
        name: str,
        speed: float,
        propulsion: str,
        cabins: int,
        fuel_capacity: float,
        consumption_rate: float,
    ) -> None:
        super().__init__(name, speed, propulsion, fuel_capacity)
        self.cabins = cabins
        _require_non_negative("consumption_rate", consumption_rate)
        self.consumption_rate = consumption_rate

    def move(self, distance: float) -> float:
        moved = self._consume(distance, self.consumption_rate)
        if moved:
            logger.info(
                f"{self.name} sails gracefully with {self.cabins} cabins, "
                f"moved {moved} km."
            )
        return moved

    def info(self) -> str:
        return f"{super().info()}\nNumber of cabins: {self.cabins}"


class Helicopter(AirTransport):
    def __init__(
        self,
        name: str,
        speed: float,
        altitude: float,
        passengers: int,
        fuel_capacity: float,
        consumption_rate: float,
    ) -> None:
        super().__init__(name, speed, altitude, fuel_capacity)
        self.passengers = passengers
        _require_non_negative("consumption_rate", consumption_rate)
        self.consumption_rate = consumption_rate

    def move(self, distance: float) -> float:
        moved = self._consume(distance, self.consumption_rate)
        if moved:
            logger.info(
                f"{self.name} flies at {self.altitude} meters altitude with "
                f"{self.passengers} passengers, moved {moved} km."
            )
        return moved

    def info(self) -> str:
        return (
            f"{super().info()}\n"
            f"Number of passengers: {self.passengers}, "
            f"Fuel consumption rate: {self.consumption_rate} L/km"
        )
