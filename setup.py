from setuptools import setup, find_packages
import jvmti


with open('readme.rst') as f:
    long_description = f.read()


setup(
    name='jvmti',
    description="Parser and formatter for java virtual machine type signatures",
    long_description=long_description,
    version=jvmti.__version__,
    include_package_data=True,
    packages=find_packages(exclude=["*.test.*", "test"]),
    package_data={'': ["*.rst"]},
    extras_require={
        'test': ['hypothesis', 'pytest'],
    },
    entry_points={
        'console_scripts': [
            'jvmti-sig = jvmti.cli.sig:sig',
        ]
    },
    license='BSD',
    classifiers=[
        'License :: OSI Approved :: BSD License',
        'Development Status :: 3 - Alpha',
        'Programming Language :: Java',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        'Programming Language :: Python :: Implementation :: PyPy',
        'Topic :: Software Development :: Libraries',
        'Topic :: Software Development :: Disassemblers',
    ]
)
