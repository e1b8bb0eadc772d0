from setuptools import find_packages, setup

setup(
    name="hookwork",
    version="0.1.0",
    description="In-process named-hook dispatch engine with priority-ordered actions and filters",
    packages=find_packages(include=["hookwork", "hookwork.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2",
        "PyYAML>=6",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": ["hookwork=hookwork.cli:main"],
    },
)
