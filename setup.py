import setuptools

setuptools.setup(
    name = 'paracurve',
    version = '1.0',
    description = 'closed-form parametric curves sampled into polylines',
    packages = setuptools.find_packages(exclude=['tests']),
    python_requires = '>=3.6',
    install_requires=['numpy', 'scipy'],
    extras_require={'test': ['pytest']},
)
