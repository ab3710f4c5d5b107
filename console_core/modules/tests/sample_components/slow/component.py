import time

# Heavy module: takes a while to import
time.sleep(0.3)


def Component(request, **context):
    return {'title': 'Slow', 'sections': []}
