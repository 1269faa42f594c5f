KB = 1024
MB = 1024 * KB
