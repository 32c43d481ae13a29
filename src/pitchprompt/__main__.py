from pitchprompt.cli import main

main()
