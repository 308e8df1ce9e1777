"""
Purpose: Pick the character a question is "told" by. Pure seasoning for the
prompt; carries no state beyond its name.

Testing: Inject a seeded random.Random for reproducible sequences.
"""

from __future__ import annotations
import random
from typing import Optional

# Kept to characters from before 2010, nothing aimed at toddlers.
CHARACTERS: tuple[str, ...] = (
    "Batman",
    "Iron Man",
    "Sherlock Holmes",
    "Rick Sanchez",
    "SpongeBob SquarePants",
    "Optimus Prime",
    "Yoda",
    "Dexter from Dexter's Lab",
    "Mario",
    "Luigi",
    "Princess Peach",
    "Bowser",
    "Donkey Kong",
    "Link",
    "Zelda",
    "Kirby",
    "Pikachu",
    "Charizard",
    "Sonic the Hedgehog",
    "Tails",
    "Knuckles",
    "Crash Bandicoot",
    "Spyro the Dragon",
    "Steve from Minecraft",
    "Creeper from Minecraft",
    "Master Chief",
    "Lara Croft",
    "Kratos",
    "Ratchet",
    "Clank",
    "Sackboy",
    "Pac-Man",
    "Ms. Pac-Man",
    "Wreck-It Ralph",
    "Elsa",
    "Anna",
    "Shrek",
    "Donkey from Shrek",
    "Po from Kung Fu Panda",
    "Gru from Despicable Me",
    "Minion (Kevin)",
    "Spider-Man (Miles Morales)",
    "Spider-Man (Peter Parker)",
    "Goku (Dragon Ball Z)",
    "Buzz Lightyear",
    "Woody",
    "Lightning McQueen",
    "Mater",
    "Sully from Monsters, Inc.",
    "Mike Wazowski",
    "Homer Simpson",
    "Bart Simpson",
    "Lisa Simpson",
    "Marge Simpson",
    "Mickey Mouse",
    "Donald Duck",
    "Goofy",
    "Scrooge McDuck",
    "Phineas",
    "Ferb",
    "Perry the Platypus",
    "Ash Ketchum",
    "Tom (Tom and Jerry)",
    "Jerry (Tom and Jerry)",
    "Bugs Bunny",
    "Daffy Duck",
    "Scooby-Doo",
    "Shaggy",
    "Ben Tennyson (Ben 10)",
    "Finn the Human",
    "Jake the Dog",
    "Gumball Watterson",
    "Darwin Watterson",
    "Steven Universe",
    "Raven (Teen Titans)",
    "Beast Boy",
    "Robin (Teen Titans)",
    "Cyborg (Teen Titans)",
    "Mordecai (Regular Show)",
    "Rigby (Regular Show)",
)


def pick_persona(rng: Optional[random.Random] = None) -> str:
    """Uniform pick, with replacement."""
    return (rng or random).choice(CHARACTERS)
