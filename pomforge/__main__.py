from pomforge.cli.app import run

run()
