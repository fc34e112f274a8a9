from checkprocs.cli import run

run()
