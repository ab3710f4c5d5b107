raise RuntimeError('broken module package')
