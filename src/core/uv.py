# core/uv.py
class UV:
    """
    Represents a 2D surface coordinate, both components in [0, 1].
    """
    def __init__(self, u: float, v: float):
        self.u = u
        self.v = v

    def __repr__(self) -> str:
        return f"UV({self.u}, {self.v})"
