from taskjournal.main import app

app(prog_name="journal")
