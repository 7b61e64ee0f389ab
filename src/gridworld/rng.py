from dataclasses import dataclass

# mulberry32. All arithmetic is unsigned 32-bit wraparound so every
# conforming implementation yields the same stream for the same seed.
MASK32 = 0xFFFFFFFF
INCREMENT = 0x6D2B79F5
TWO_32 = 4294967296.0

def mb32_step(state: int) -> int:
    return (state + INCREMENT) & MASK32

def mb32_mix(state: int) -> int:
    t = ((state ^ (state >> 15)) * (state | 1)) & MASK32
    t = ((t + ((t ^ (t >> 7)) * (t | 61))) & MASK32) ^ t
    return t ^ (t >> 14)

@dataclass
class Mulberry32:
    state: int

    def __post_init__(self) -> None:
        self.state &= MASK32

    def next32(self) -> int:
        self.state = mb32_step(self.state)
        return mb32_mix(self.state)

    def next(self) -> float:
        """Uniform float in [0, 1)."""
        return self.next32() / TWO_32

    def bounded(self, n: int) -> int:
        # floor(next() * n) -> 0..n-1
        assert n > 0
        return int(self.next() * n)

def seed_for_level(level: int, multiplier: int) -> int:
    """Level seed: level * multiplier, wrapped to 32 bits."""
    return (level * multiplier) & MASK32
