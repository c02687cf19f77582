from os import path

from setuptools import setup

this_dir = path.abspath(path.dirname(__file__))
with open(path.join(this_dir, "README.md")) as f:
    long_description = f.read()

setup(
    name="FastMediator",
    description="FastMediator - in-process mediator for requests, notifications and pipeline behaviors",
    long_description=long_description,
    long_description_content_type="text/markdown",
    version="0.1",
    license="MIT",
    packages=["fastmediator", "fastmediator.core", "fastmediator.test"],
    package_data={
        "fastmediator": ["py.typed"],
        "fastmediator.core": ["py.typed"],
        "fastmediator.test": ["py.typed"],
    },
    keywords=["fastmediator", "mediator", "cqrs", "pipeline", "fastapi"],
    python_requires=">=3.9",
    install_requires=[
        "fastapi",
        "uvicorn",
        "colorama",
        "tenacity",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
            "httpx",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.9",
    ],
    entry_points={
        "console_scripts": [
            "mediator = fastmediator.command:console_main",
        ]
    },
)
