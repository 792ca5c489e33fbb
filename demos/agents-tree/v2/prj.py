# coding=utf-8

# statically linked variant
target = 'v2_app'
kind = 'executable'
requires = 'so_5/prj_s.yaml'
sources = ['main.cpp']
