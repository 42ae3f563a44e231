"""rating values and the systems they belong to"""
