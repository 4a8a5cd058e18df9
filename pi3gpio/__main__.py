from pi3gpio import run

run()
