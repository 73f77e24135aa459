import matplotlib

# No interactive windows while testing
matplotlib.use('Agg')
