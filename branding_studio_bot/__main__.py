# branding_studio_bot/__main__.py
from branding_studio_bot.bot import main

main()
