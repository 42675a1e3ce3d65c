from misconfig_api.main import run

run()
