from setuptools import setup, find_packages

setup(
    name="padthai-checkers",
    version="1.0.0",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.8",
    install_requires=[
        "PyYAML>=5.4",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "padthai=padthai.__main__:main",
        ],
    },
    author="Pad Thai Checkers Team",
    description="Stateless checkers engine: move generation, forced captures and alpha-beta search",
)
