from portcullis.main import main

main()
