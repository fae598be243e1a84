"""A four-lane arcade hit-circle game with helpers for input, logging, files and monitors."""

__version__ = "0.1.0"