"""Briques du bot : navigateur, surface, snapshot, inférence, politique, debug."""
