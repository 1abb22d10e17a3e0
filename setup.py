from setuptools import setup, find_packages

setup(
    name="terminal-trivia",
    version="0.1.0",
    description="Single-player terminal trivia game with timed scoring and a persistent leaderboard",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.24.0",
        "PyYAML>=6.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "trivia-game=trivia_game.menu:main",
        ],
    },
)
