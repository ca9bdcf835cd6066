from setuptools import find_packages, setup


setup(
    name="logistics-factory",
    version="1.0.0",
    description="Factory method delivery planner",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "overrides",
    ],
    extras_require={
        "test": ["pytest"],  # Test
    },
)
