#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
subenum包的安装脚本
"""

from setuptools import setup, find_packages
import os

# 获取包的版本号
try:
    with open(os.path.join('subenum', '__init__.py'), 'r', encoding='utf-8') as f:
        for line in f:
            if line.startswith('__version__'):
                version = line.strip().split('=')[1].strip().strip('"').strip("'")
                break
        else:
            version = '0.1.0'
except Exception:
    version = '0.1.0'

# 读取README文件内容
try:
    with open('README.md', 'r', encoding='utf-8') as f:
        long_description = f.read()
except Exception:
    long_description = "异步 DNS 子域名枚举工具"

# 定义依赖项
install_requires = [
    'dnspython>=2.4.0',
    'aiodns>=3.0.0,<4',
    'PyYAML>=6.0',
]

# 设置包的配置
setup(
    name='subenum',
    version=version,
    description='异步 DNS 子域名枚举工具（按 QPS 限速）',
    long_description=long_description,
    long_description_content_type='text/markdown',
    author='PyHack-Lab',
    author_email='',
    url='',
    packages=find_packages(exclude=['tests', 'tests.*']),
    package_data={'subenum': ['config/*.yaml']},
    include_package_data=True,
    install_requires=install_requires,
    extras_require={
        'test': ['pytest>=7.0'],
    },
    python_requires='>=3.9',
    entry_points={
        'console_scripts': [
            'subenum=subenum.main:run',
        ],
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Intended Audience :: Information Technology',
        'Intended Audience :: System Administrators',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Topic :: Security',
        'Topic :: Internet :: Name Service (DNS)',
        'Topic :: Utilities',
    ],
    keywords='subdomain-enumeration, dns, security, penetration-testing, rate-limit',
)
