from obsidian_manager.main import main

main()
