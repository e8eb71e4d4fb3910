from dataclasses import dataclass


@dataclass
class Character:
    first_name: str
    last_name: str


@dataclass
class Sith(Character):
    id: str


def make_character(c) -> Character:
    return Character('Anakin', 'Skywalker')


def make_sith(c) -> Sith:
    return Sith('Anakin', 'Skywalker', 'DarthVader')
