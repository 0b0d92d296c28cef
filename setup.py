from setuptools import find_packages, setup

setup(
    name='payment-gateway',
    version='0.1.0',
    packages=find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.8',
    entry_points={
        'console_scripts': [
            'payment-gateway=payment_gateway.__main__:main',
        ],
    },
    install_requires=[
        'click',
        'eth-utils',
        'flask',
        'flask-marshmallow',
        'marshmallow>=3.13',
        'pluggy',
        'prometheus-client',
        'structlog',
        'waitress',
        'web3>=7',
    ],
    extras_require={
        'test': [
            'hexbytes',
            'pytest',
        ],
    },
)
