"""Command-line subcommands for circlelayout"""
