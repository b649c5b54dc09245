"""The alt_bn128 (BN254) fields and groups."""

from __future__ import annotations

import threading
from typing import Optional

from .curve import Curve
from .f12field import F12Field
from .f2field import F2Field
from .f6field import F6Field
from .primefield import PrimeField

Q = 21888242871839275222246405745257275088696311157297823662689037894645226208583
R = 21888242871839275222246405745257275088548364400416034343698204186575808495617

_G2_B = (
    "19485874751759354771024239261021720505790618469301721065564631296452457478373, "
    "266929791119991161246907387137283842545076965332900288569378510910307636690"
)
_G2_X = (
    "10857046999023057135944570762232829481370756359578518086990519993285655852781, "
    "11559732032986387107991004021392285783925812861821192530917403151452391805634"
)
_G2_Y = (
    "8495653923123431417604973247489272438418190587263600148770280649306958101930, "
    "4082367875863433681332203403145435568316851327593401208105741076214120093531"
)


class Engine:
    """The base field tower, the scalar field and the groups G1 and G2."""

    def __init__(self) -> None:
        self.f1 = PrimeField(Q)
        self.f2 = F2Field(self.f1, "-1")
        self.f6 = F6Field(self.f2)
        self.f12 = F12Field(self.f6)
        self.fr = PrimeField(R)
        self.g1 = Curve(self.f1, "0", "3", "1", "2")
        self.g2 = Curve(self.f2, "0,0", _G2_B, _G2_X, _G2_Y)


_engine: Optional[Engine] = None
_engine_lock = threading.Lock()


def get_engine() -> Engine:
    """The shared engine, built on first use."""
    global _engine
    with _engine_lock:
        if _engine is None:
            _engine = Engine()
        return _engine