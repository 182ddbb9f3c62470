"""Bot démineur : inférence locale du risque et boucle observe → décide → révèle."""

__version__ = "0.1.0"
