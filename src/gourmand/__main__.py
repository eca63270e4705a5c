from gourmand.entrypoints.cli.app import run

run()
