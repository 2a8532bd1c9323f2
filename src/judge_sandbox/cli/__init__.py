"""
Judge Sandbox CLI

Command line front end (judge-run).
"""
