from dataclasses import dataclass

@dataclass(frozen=True)
class GenConfig:
    # Reference values reproduce the published levels exactly.
    size: int = 10
    seed_multiplier: int = 12345
    wall_density: float = 0.2
    hazard_density: float = 0.15
    max_attempts: int = 1000
    max_end_redraws: int = 100
    # Cap on level+1 reseeding; only reachable with a misconfigured generator.
    max_fallbacks: int = 100

    def validate(self) -> None:
        if self.size < 2:
            raise ValueError(f"size must be >= 2, got {self.size}")
        for name in ("wall_density", "hazard_density"):
            v = getattr(self, name)
            if not (0.0 <= v <= 1.0):
                raise ValueError(f"{name} must be within [0, 1], got {v}")
        for name in ("max_attempts", "max_end_redraws"):
            if getattr(self, name) < 1:
                raise ValueError(f"{name} must be positive")
        if self.max_fallbacks < 0:
            raise ValueError("max_fallbacks must be >= 0")

# Global defaults (tools may build their own GenConfig)
DEFAULT = GenConfig()
