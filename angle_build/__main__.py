from angle_build.cli import main

main()
