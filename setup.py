from setuptools import setup, find_packages

setup(
    name="elp-git-helper",
    version="1.0.0",
    description="Elp: one-command add/commit/push, pull and remote setup on top of git",
    author="Mike White",
    python_requires=">=3.9",
    packages=find_packages(include=["elp", "elp.*"]),
    install_requires=["pyyaml>=6.0.0"],
    extras_require={
        "dev": ["pytest>=7.4.0"],
    },
    entry_points={"console_scripts": ["elp=elp.cli:main"]},
    keywords=["git", "workflow", "cli"],
    license="Apache-2.0",
)
