import random
from typing import List, Optional, Sequence
from dataclasses import dataclass
from faker import Faker

## === Config Class === ##

@dataclass
class TextConfig:
    """
    Configuration for TextGenerator
        planted_share: float, probability that a sentence gets a planted word
        sentences: int, sentences per generated text
        locale: str, Faker locale used for the filler sentences
        seed: int, seed for random number generator
    """
    planted_share: float = 0.2
    sentences: int = 3
    locale: str = "en_US"
    seed: Optional[int] = None

    def __post_init__(self):
        if not 0.0 <= self.planted_share <= 1.0:
            raise ValueError("planted_share must be between 0 and 1")
        if self.sentences < 1:
            raise ValueError("sentences must be positive")


class TextGenerator:
    """Filler text with sensitive words planted between whitespace-separated tokens."""

    def __init__(self, config: TextConfig, words: Sequence[str] = ()):
        self.config = config
        self.words = [w for w in words if w]
        if self.config.planted_share > 0 and not self.words:
            raise ValueError("planted_share > 0 needs at least one word to plant")
        self.rng = random.Random(self.config.seed)

        self.fake = Faker(self.config.locale)
        if self.config.seed is not None:
            self.fake.seed_instance(self.config.seed)

    def _plant(self, sentence: str) -> str:
        tokens = sentence.split(" ")
        word = self.rng.choice(self.words)
        tokens.insert(self.rng.randint(0, len(tokens)), word)
        return " ".join(tokens)

    def single(self, sentences: Optional[int] = None) -> str:
        n = self.config.sentences if sentences is None else sentences
        if n < 1:
            raise ValueError("sentences must be positive")
        out = []
        for _ in range(n):
            sentence = self.fake.sentence()
            if self.rng.random() < self.config.planted_share:
                sentence = self._plant(sentence)
            out.append(sentence)
        return " ".join(out)

    def batch(self, n: int, sentences: Optional[int] = None) -> List[str]:
        if n <= 0:
            raise ValueError("n must be positive")
        return [self.single(sentences) for _ in range(n)]
