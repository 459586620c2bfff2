from launcher.cli import cli

cli(prog_name="launch")
