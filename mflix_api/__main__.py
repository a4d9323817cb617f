from mflix_api.main import run

run()
