from pathlib import Path

import setuptools


def load_requirements(filename: str) -> list[str]:
    requirements = []
    for line in Path(__file__).with_name(filename).read_text(encoding="utf-8").splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        requirements.append(stripped)
    return requirements


setuptools.setup(
    name="swu_draw_odds",
    version="0.1",
    description="Hypergeometric draw odds calculator for Star Wars: Unlimited decks",
    packages=["controllers", "services", "utils", "utils.constants", "widgets"],
    py_modules=["main"],
    classifiers=["Programming Language :: Python :: 3"],
    python_requires=">=3.11",
    install_requires=load_requirements("requirements.txt"),
    extras_require={
        "gui": ["wxPython>=4.2"],
        "test": ["pytest>=7"],
    },
    entry_points={"gui_scripts": ["swu-draw-odds=main:main"]},
)
