"""Fixed lookup tables for generated employees.

Czech given names and surnames, split by gender, plus the default set of
allowed workloads.  Surnames use the grammatically gendered forms, so the
female list is not a mechanical derivation of the male one.  All tables are
immutable tuples.
"""

from __future__ import annotations

from typing import Final

from staffgen.models import Gender

__all__ = [
    "MALE_NAMES",
    "FEMALE_NAMES",
    "MALE_SURNAMES",
    "FEMALE_SURNAMES",
    "NAMES",
    "SURNAMES",
    "DEFAULT_WORKLOADS",
]

MALE_NAMES: Final[tuple[str, ...]] = tuple(
    """
Adam Aleš Alexandr Bohumil Bohdan Branislav Cyril Ctibor Daniel David Eduard
Emil František Filip Gabriel Gustav Hynek Hugo Ivan Ivo Jan Jiří Josef Karel
Kristián Lukáš Lubomír Leo Martin Marek Matěj Norbert Nikola Otakar Oliver
Petr Patrik Radek Roman Stanislav Samuel Šimon Tomáš Tadeáš Václav Viktor
Vladimír Zikmund Zdeněk Zachariáš
""".split()
)

FEMALE_NAMES: Final[tuple[str, ...]] = tuple(
    """
Anna Adéla Agáta Barbora Božena Beáta Cecilie Celestýna Dagmar Dominika Eva
Eliška Frida Františka Gabriela Gita Hana Helena Ivana Irena Jana Jitka Julie
Karolína Kristýna Klára Lucie Lenka Lada Marie Markéta Magdaléna Nela Nikola
Olga Petra Pavla Renata Radka Simona Soňa Stella Tereza Tatiana Veronika Věra
Valerie Zuzana Zita Zora
""".split()
)

MALE_SURNAMES: Final[tuple[str, ...]] = tuple(
    """
Bartoš Beneš Beránek Bílý Čech Černý Doležal Dvořák Fiala Hájek Havlíček Holub
Horák Jelínek Kadlec Konečný Kolář Koubek Krejčí Kříž Král Kratochvíl Mach
Matoušek Marek Moravec Němec Novák Novotný Pavelka Pokorný Procházka Rada
Růžička Sedláček Šebesta Šimek Sýkora Strnad Vacek Veselý Volf Vorel Urban
Zahradník Zelenka Zvěřina Zima Zoufalý Zeman
""".split()
)

FEMALE_SURNAMES: Final[tuple[str, ...]] = tuple(
    """
Adamcová Bartošová Bednářová Bílá Čechová Černá Doležalová Dvořáková Fialová
Hájková Havlíčková Holubová Horáková Jelínková Kadlecová Konečná Kolářová
Hotová Křížová Králová Kratochvílová Machová Matoušková Marková Moravcová
Nováková Novotná Pavlíková Pokorná Procházková Růžičková Drsná Sedláčková
Šebestová Šimková Sýkorová Strnadová Vacková Veselá Volfová Marešová Urbanová
Zahradníková Zelenková Zimová Zoufalá Benešová Beránková Gottwaldová
Holečková
""".split()
)

NAMES: Final[dict[Gender, tuple[str, ...]]] = {
    "male": MALE_NAMES,
    "female": FEMALE_NAMES,
}

SURNAMES: Final[dict[Gender, tuple[str, ...]]] = {
    "male": MALE_SURNAMES,
    "female": FEMALE_SURNAMES,
}

DEFAULT_WORKLOADS: Final[tuple[int, ...]] = (10, 20, 30, 40)
