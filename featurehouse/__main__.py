from featurehouse.cli.main import app

app()
