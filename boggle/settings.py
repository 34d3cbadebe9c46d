"""Engine settings with per-field environment overrides."""
import os
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class Settings:
    BASE_DIR: Path = field(default_factory=lambda: Path(__file__).resolve().parent.parent)

    DICTIONARY_PATH: Path = field(init=False)

    BOARD_SIZE: int = 5
    MIN_WORD_LENGTH: int = 3
    VOWELS: str = "aeiouy"

    USE_TRIE_SOLVER: bool = False
    DEBUG: bool = False

    def __post_init__(self):
        self.DICTIONARY_PATH = self.BASE_DIR / "words_alpha.txt"

        # Override from environment
        for fld in self.__dataclass_fields__:
            env_val = os.environ.get(fld)
            if env_val is not None:
                current = getattr(self, fld)
                if isinstance(current, bool):
                    setattr(self, fld, env_val.lower() in ("1", "true", "yes"))
                elif isinstance(current, int):
                    setattr(self, fld, int(env_val))
                elif isinstance(current, Path):
                    setattr(self, fld, Path(env_val))
                else:
                    setattr(self, fld, env_val)

        for fld in ("BOARD_SIZE", "MIN_WORD_LENGTH"):
            if getattr(self, fld) < 2:
                raise ValueError(f"{fld} must be at least 2, got {getattr(self, fld)}")


settings = Settings()
