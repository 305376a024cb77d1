RECORD_STATUSES = ('pending', 'approved', 'rejected')

MONTHS = ('Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun', 'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec')

TOP_LOCATIONS = 5

UNKNOWN_LOCATION = 'Unknown'
