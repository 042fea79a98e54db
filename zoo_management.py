"""
Zoo Management Simulation

Features:
- Core OOP: Animal hierarchy (ABC), SoundMaker capability (ABC), Habitat, Zoo
- Encapsulation (read-only id/species, copies of internal lists), inheritance,
  polymorphism over two independent capabilities (eating and sound-making)
- Injectable IdIssuer so animal identifiers are predictable in tests
- Observer-style EventLog: habitats and the zoo report what happened, the
  event log keeps it and forwards it to the logging module
- Factory (AnimalFactory) for the fixed set of animal kinds
- Custom exceptions (ZooError, UnknownSpeciesError)
- Census report as plain text or PDF (reportlab)
- Command line entry point running the sample scenario
"""

import argparse
import logging
import sys
from abc import ABC, abstractmethod
from itertools import count
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

logger = logging.getLogger(__name__)

# Number of recent events shown at the bottom of a census report.
REPORT_EVENT_TAIL = 10

# -----------------------
# Custom Exceptions
# -----------------------


class ZooError(Exception):
    """Base class for zoo management exceptions."""
    pass


class UnknownSpeciesError(ZooError):
    pass

# -----------------------
# Event Log (observer)
# -----------------------


class EventLog:
    """
    Collects notifications from habitats and the zoo.

    Every message is kept in order and also emitted through the module logger,
    so state-changing code never prints by itself.
    """

    def __init__(self):
        self.events: List[str] = []

    def notify(self, message: str):
        self.events.append(message)
        logger.info(message)

    def tail(self, n: int) -> List[str]:
        if n <= 0:
            return []
        return self.events[-n:]

    def __len__(self):
        return len(self.events)

# -----------------------
# Identifier issuing
# -----------------------


class IdIssuer:
    """Hands out increasing integer ids, starting at `start`."""

    def __init__(self, start: int = 1):
        self._counter = count(start)

    def next_id(self) -> int:
        return next(self._counter)


# shared by every animal created without an explicit issuer
_default_ids = IdIssuer()

# -----------------------
# Abstract Animal (ABC) and capabilities
# -----------------------


class SoundMaker(ABC):
    """Capability implemented only by animals that can make a sound."""

    @abstractmethod
    def make_sound(self) -> str:
        pass


class Animal(ABC):
    """
    Abstract base class for all animals.

    Creating an animal registers it in the given habitat straight away.
    """

    def __init__(self, name: str, age: int, species: str, habitat: "Habitat",
                 ids: Optional[IdIssuer] = None):
        self._id = (ids or _default_ids).next_id()
        self._species = species
        self.name = name
        self.age = age
        habitat.add_animal(self)

    # id and species are fixed once the animal exists
    @property
    def id(self) -> int:
        return self._id

    @property
    def species(self) -> str:
        return self._species

    @abstractmethod
    def eat(self) -> str:
        pass

    def __repr__(self):
        return f"{type(self).__name__}(id={self.id}, name={self.name!r}, age={self.age})"

# -----------------------
# Concrete Animal classes
# -----------------------


class Lion(Animal, SoundMaker):
    def __init__(self, name: str, age: int, habitat: "Habitat", ids: Optional[IdIssuer] = None):
        super().__init__(name, age, "Lion", habitat, ids=ids)

    def eat(self):
        return f"{self.name} the Lion is eating meat."

    def make_sound(self):
        return f"{self.name} the Lion is roaring!"


class Elephant(Animal, SoundMaker):
    def __init__(self, name: str, age: int, habitat: "Habitat", ids: Optional[IdIssuer] = None):
        super().__init__(name, age, "Elephant", habitat, ids=ids)

    def eat(self):
        return f"{self.name} the Elephant is eating peanuts."

    def make_sound(self):
        return f"{self.name} the Elephant is trumpeting!"


class Monkey(Animal, SoundMaker):
    def __init__(self, name: str, age: int, habitat: "Habitat", ids: Optional[IdIssuer] = None):
        super().__init__(name, age, "Monkey", habitat, ids=ids)

    def eat(self):
        return f"{self.name} the Monkey is eating bananas."

    def make_sound(self):
        return f"{self.name} the Monkey is chattering!"


# Fish stay quiet: no SoundMaker here
class Fish(Animal):
    def __init__(self, name: str, age: int, habitat: "Habitat", ids: Optional[IdIssuer] = None):
        super().__init__(name, age, "Fish", habitat, ids=ids)

    def eat(self):
        return f"{self.name} the Fish is eating seaweed."

# -----------------------
# Habitat
# -----------------------


class Habitat:
    """
    A named home for animals. Members keep their arrival order.
    """

    def __init__(self, name: str, events: Optional[EventLog] = None):
        self._name = name
        self._animals: List[Animal] = []
        self._events = events
        self._notify(f"Added {name} Habitat to the Zoo.")

    @property
    def name(self) -> str:
        return self._name

    def _notify(self, message: str):
        if self._events is not None:
            self._events.notify(message)

    def add_animal(self, animal: Animal):
        self._animals.append(animal)
        self._notify(f"Added {animal.name} the {animal.species} to the {self.name} habitat.")

    def list_animals(self) -> Tuple[Animal, ...]:
        return tuple(self._animals)

    def __len__(self):
        return len(self._animals)

    def __repr__(self):
        return f"Habitat({self.name!r}, animals={len(self)})"

# -----------------------
# Factory Pattern for Animals
# -----------------------


class AnimalFactory:
    """
    Factory to create animals by species name.
    """

    KINDS = {
        'lion': Lion,
        'elephant': Elephant,
        'monkey': Monkey,
        'fish': Fish,
    }

    def __init__(self, ids: Optional[IdIssuer] = None):
        self.ids = ids

    def create(self, species: str, name: str, age: int, habitat: Habitat) -> Animal:
        kind = self.KINDS.get(species.strip().lower())
        if kind is None:
            raise UnknownSpeciesError(f"No animal kind called {species!r}.")
        return kind(name, age, habitat, ids=self.ids)

# -----------------------
# Zoo (registry)
# -----------------------


# (habitat name, descriptions produced by that habitat's animals)
HabitatRound = Tuple[str, List[str]]


class Zoo:
    """
    Main zoo class: owns the habitats and the per-species counts.

    Counts are only refreshed by recompute_counts(), and every call adds to
    what is already stored. Call reset_counts() first for a fresh snapshot.
    """

    def __init__(self, events: Optional[EventLog] = None):
        self._habitats: List[Habitat] = []
        self._species_counts: Dict[str, int] = {}
        self._events = events
        self._notify("New Zoo Created...")

    def _notify(self, message: str):
        if self._events is not None:
            self._events.notify(message)

    @property
    def habitats(self) -> Tuple[Habitat, ...]:
        return tuple(self._habitats)

    @property
    def species_counts(self) -> Dict[str, int]:
        return dict(self._species_counts)

    def add_habitat(self, habitat: Habitat):
        self._habitats.append(habitat)

    def recompute_counts(self):
        for habitat in self._habitats:
            for animal in habitat.list_animals():
                self._species_counts[animal.species] = self._species_counts.get(animal.species, 0) + 1

    def reset_counts(self):
        self._species_counts.clear()

    def count_for_species(self, species: str) -> int:
        return self._species_counts.get(species, 0)

    def feed_all(self) -> List[HabitatRound]:
        """
        Feed every animal, habitat by habitat, in arrival order.
        """
        self._notify("Feeding all animals...")
        rounds = []
        for habitat in self._habitats:
            self._notify(f"In {habitat.name} habitat:")
            meals = []
            for animal in habitat.list_animals():
                meal = animal.eat()
                self._notify(meal)
                meals.append(meal)
            rounds.append((habitat.name, meals))
        return rounds

    def make_all_sound(self) -> List[HabitatRound]:
        """
        Let every animal that has the SoundMaker capability make its sound.

        Animals without it (Fish) are skipped without complaint.
        """
        self._notify("Making all animals sound...")
        rounds = []
        for habitat in self._habitats:
            self._notify(f"In {habitat.name} habitat:")
            sounds = []
            for animal in habitat.list_animals():
                if isinstance(animal, SoundMaker):
                    sound = animal.make_sound()
                    self._notify(sound)
                    sounds.append(sound)
            rounds.append((habitat.name, sounds))
        return rounds

# -----------------------
# Census report (text / PDF)
# -----------------------


def census_lines(zoo: Zoo, event_log: Optional[EventLog] = None) -> List[str]:
    lines = ["Zoo Census", ""]
    lines.append("Habitats:")
    for habitat in zoo.habitats:
        lines.append(f"- {habitat.name}: {len(habitat)} animals")
        for a in habitat.list_animals():
            lines.append(f"    #{a.id} {a.name} ({a.species}) Age:{a.age}")
    lines.append("")
    lines.append("Animals by species:")
    for species, n in sorted(zoo.species_counts.items()):
        lines.append(f"- {species}: {n}")
    if event_log is not None:
        lines.append("")
        lines.append("Recent Events:")
        for e in event_log.tail(REPORT_EVENT_TAIL):
            lines.append(f"- {e}")
    return lines


def _write_pdf(lines: Sequence[str], path: Path):
    c = canvas.Canvas(str(path), pagesize=letter)
    _, height = letter
    top, bottom, leading = height - 42, 40, 14
    text = c.beginText(40, top)
    text.setFont("Helvetica", 12)
    for line in lines:
        if text.getY() < bottom:
            c.drawText(text)
            c.showPage()
            text = c.beginText(40, top)
            text.setFont("Helvetica", 12)
        text.textLine(line)
    c.drawText(text)
    c.showPage()
    c.save()


def write_report(zoo: Zoo, path, event_log: Optional[EventLog] = None) -> Path:
    """
    Write a census of the zoo to `path`.

    A .pdf suffix renders the report with reportlab, any other suffix gives a
    UTF-8 text file.
    """
    path = Path(path)
    lines = census_lines(zoo, event_log)
    if path.suffix.lower() == ".pdf":
        _write_pdf(lines, path)
    else:
        with open(path, "w", encoding="utf-8") as f:
            for line in lines:
                f.write(line + "\n")
    logger.debug("Census report written to %s", path)
    return path

# -----------------------
# Sample scenario
# -----------------------


SAMPLE_HABITATS = ["Savannah", "Jungle", "Pond"]

# (species, name, age, habitat)
SAMPLE_ANIMALS = [
    ("Lion", "Simba", 5, "Savannah"),
    ("Lion", "Simba", 5, "Savannah"),
    ("Elephant", "Dumbo", 8, "Savannah"),
    ("Monkey", "George", 3, "Jungle"),
    ("Fish", "Nemo", 2, "Pond"),
]

# species -> how the count line names them
COUNT_LABELS = [
    ("Lion", "Lions"),
    ("Elephant", "Elephants"),
    ("Monkey", "Monkeys"),
    ("Fish", "Fish"),
]


def build_sample_zoo(events: Optional[EventLog] = None, ids: Optional[IdIssuer] = None) -> Zoo:
    zoo = Zoo(events)
    habitats = {}
    for name in SAMPLE_HABITATS:
        habitats[name] = Habitat(name, events)
        zoo.add_habitat(habitats[name])
    factory = AnimalFactory(ids)
    for species, name, age, home in SAMPLE_ANIMALS:
        factory.create(species, name, age, habitats[home])
    return zoo

# -----------------------
# Main Entry
# -----------------------


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Run the zoo management demonstration.")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="verbosity of the event output")
    parser.add_argument("--report", type=Path, default=None,
                        help="write a census report here (.pdf for PDF, anything else for text)")
    return parser.parse_args(argv)


def run_demo(events: EventLog, ids: Optional[IdIssuer] = None) -> Zoo:
    zoo = build_sample_zoo(events, ids)
    zoo.recompute_counts()
    zoo.feed_all()
    zoo.make_all_sound()
    for species, label in COUNT_LABELS:
        events.notify(f"Number of {label} in the zoo: {zoo.count_for_species(species)}")
    return zoo


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(message)s")

    events = EventLog()
    try:
        zoo = run_demo(events)
    except ZooError as e:
        logger.error("Demonstration failed: %s", e)
        return 1

    if args.report is not None:
        try:
            path = write_report(zoo, args.report, events)
        except OSError as e:
            logger.error("Could not write report %s: %s", args.report, e)
            return 1
        logger.info("Generated report: %s", path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
