from setuptools import setup
from pathlib import Path

setup(
    name='kube-quantity',
    version="0.9.0",
    description='Parsing and exact arithmetic for kubernetes resource quantities',
    long_description=Path("README.md").read_text(),
    long_description_content_type="text/markdown",
    license='MIT',
    packages=['kube_quantity', 'kube_quantity.core', 'kube_quantity.utils'],
    install_requires=[
        'lightkube >= 0.17.0',
        'lightkube-models >= 1.15.12.0',
        'PyYAML'
    ],
    extras_require={
        "dev": [
            "pytest",
        ]
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Intended Audience :: System Administrators',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Programming Language :: Python :: 3.13'
    ]
)
