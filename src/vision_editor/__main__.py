from vision_editor.adapters.textual.app import main

if __name__ == "__main__":
    main()
