from printfleet.cli import app

app()
