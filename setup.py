from setuptools import find_packages, setup

setup(
    name="eventwait",
    version="0.1.0",
    description="Wait for filesystem changes using inotify",
    author="Araray Velho",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "click",
        "toml",
        "pyyaml",
        "rich",
        "inotify_simple"
    ],
    extras_require={
        "test": ["pytest"]
    },
    entry_points={
        "console_scripts": [
            "eventwait=eventwait.cli:main"
        ]
    },
)
