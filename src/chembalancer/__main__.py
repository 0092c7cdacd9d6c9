from chembalancer.cli import app

app()
