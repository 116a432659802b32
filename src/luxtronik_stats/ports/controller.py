from typing import Protocol


class ControllerPort(Protocol):
    async def get_calculations(self) -> list[int]:
        """
        Fetch the current calculation values from the heat pump controller.
        """
        ...
