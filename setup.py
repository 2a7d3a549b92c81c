"""Setup script for MedSky."""

from setuptools import setup, find_packages

setup(
    name="medsky",
    version="1.0.0",
    description="Case-study quiz service for medical students",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    package_data={"medsky.api": ["templates/*.html"]},
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "fastapi>=0.109.0",
        "uvicorn[standard]>=0.27.0",
        "jinja2>=3.1.2",
        "pydantic>=2.5.3",
        "pydantic-settings>=2.1.0",
        "python-dotenv>=1.0.0",
        "requests>=2.31.0",
        "sqlalchemy>=2.0.0",
        "passlib[bcrypt]>=1.7.4",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "httpx>=0.26.0",
        ],
    },
)
