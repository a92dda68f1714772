from employeelist.server import main

main()
