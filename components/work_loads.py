#!/usr/bin/env python3
from components.text_generator import TextConfig, TextGenerator


class WorkLoad:
    def __init__(self, seed=None, locale="en_US"):
        self.seed = seed
        self.locale = locale

    def texts(self, num_texts, words=(), planted_share=0.2, sentences=3):
        config = TextConfig(planted_share=planted_share, sentences=sentences,
                            locale=self.locale, seed=self.seed)
        return TextGenerator(config, words).batch(num_texts)
