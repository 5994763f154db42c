from l1.cli.app import app

app()
