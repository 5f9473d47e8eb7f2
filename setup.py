from setuptools import setup

test_deps = [
    'pytest',
    'pytest-django',
]
extras = {
    'test': test_deps,
    'postgresql': ['psycopg2'],
    'mysql': ['mysqlclient'],
}

with open('README.md') as readme:
    long_description = readme.read()

setup(
    name='django-nullable',
    version='0.1.0',
    description='Store empty values of nullable Django model fields as NULL',
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=[
        'django_nullable',
        'django_nullable.fields',
    ],
    install_requires=[
        'django>=3.2',
    ],
    python_requires='>=3.8',
    extras_require=extras,
    license='BSD',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Framework :: Django',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Programming Language :: Python :: 3',
    ]
)
