from setuptools import setup, find_packages

setup_args = dict(
    name='swapnet',
    version="0.1.0",
    packages=find_packages(include=['swapnet', 'swapnet.*']),
    install_requires=[
        'torch>=1.9.0',
        'numpy',
        'pyyaml',
    ],
    extras_require={
        'test': ['pytest'],
    },
    python_requires='>=3.8',
    description='Swappable feed-forward inference models behind one interface',
    license='MIT',
)

setup(**setup_args)
