from testnumbers.cli import run

run()
