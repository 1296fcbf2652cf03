FilePath = str
