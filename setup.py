from setuptools import setup, find_packages

setup(
    name='luabundle',
    version='0.1.0',
    py_modules=['packer'],
    packages=find_packages(exclude=['tests', 'tests.*']),
    package_data={
        'luabundle': ['runtime/*.lua'],
    },
    install_requires=[
        'lark',
        'pydantic>=2.0',
    ],
    extras_require={
        'test': ['pytest', 'lupa'],
    },
)
