# setup.py
from setuptools import setup, find_packages

setup(
    name="autoindexer",
    version="0.1.0",
    description="Genera páginas index.html estáticas para cada directorio de un árbol",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_packages("src"),  # Encuentra automáticamente el paquete 'autoindexer'
    package_data={
        "autoindexer": ["resources/*.css"],
    },
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'autoindexer=autoindexer.main:main',  # Permite ejecutar la herramienta vía CLI
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
