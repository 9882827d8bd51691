from errdigest.orchestrator.main import app

app(prog_name="errdigest")
