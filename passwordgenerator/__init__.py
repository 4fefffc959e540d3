"""Password generation with a heuristic strength score and a PyQt5 front end."""

from passwordgenerator.core import (
    CharacterClass,
    GenerationRequest,
    InvalidRequest,
    StrengthLevel,
    build_alphabet,
    generate,
    generate_password,
    parse_length,
    save_password,
    score_strength,
    strength_level,
)

__version__ = "1.0.0"
