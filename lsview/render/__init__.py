"""Renderers for block counts, inodes, timestamps, links, Git status, file types and sizes."""