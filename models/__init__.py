from .transformations import (
    ForwardFullClarke,
    ForwardPark,
    ForwardReducedClarke,
    InverseFullClarke,
    InversePark,
    InverseReducedClarke,
    forward_full_clarke,
    forward_park,
    forward_reduced_clarke,
    inverse_full_clarke,
    inverse_park,
    inverse_reduced_clarke,
)

__all__ = [
    "ForwardFullClarke",
    "ForwardReducedClarke",
    "InverseFullClarke",
    "InverseReducedClarke",
    "ForwardPark",
    "InversePark",
    "forward_full_clarke",
    "forward_reduced_clarke",
    "inverse_full_clarke",
    "inverse_reduced_clarke",
    "forward_park",
    "inverse_park",
]
