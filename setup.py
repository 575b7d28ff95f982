from setuptools import setup, find_packages

setup(
    name="minesweeper_annotator",
    version="0.1",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={
        "annotator": ["config.yaml"],
    },
    python_requires=">=3.9",
    install_requires=[
        "flask",
        "pyyaml",
        "numpy"
    ],
    entry_points={
        "console_scripts": [
            "minesweeper-annotate=annotator.cli:main",
            "minesweeper-annotate-ui=frontend.app:main"
        ]
    },
)
