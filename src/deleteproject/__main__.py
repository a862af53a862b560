from deleteproject.cli import app

app(prog_name="deleteproject")
